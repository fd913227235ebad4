"""Pytest configuration for the PolexEngine test suite.

Hypothesis profiles: "dev" (default), "ci" (selected when CI=true) and
"verbose". HYPOTHESIS_PROFILE overrides the choice.

Tokenizer fuzzing tests carry the ``fuzz`` marker and only run with
``pytest -m fuzz`` or when their module is named on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_FUZZ_MODULE = "test_tokenizer_fuzzing"

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless they were asked for."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="tokenizer fuzzing: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
