"""BestInvestments test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module/class/function.
- contract/  : Behavior of a port, run against every implementation of it.
- e2e/       : The `bestinvestments` CLI driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; prefer in-memory adapters over mocks.
- Contract tests parametrize implementations via fixtures.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
