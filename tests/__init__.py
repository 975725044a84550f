"""calque test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The ``calque`` CLI driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; no wall-clock dates (pass ``on=``).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property, e2e (unit and e2e are applied by directory).
"""
