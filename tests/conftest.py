"""Pytest configuration for the l10ntools test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.fake_repo import FakeRepo

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# REPOSITORY LAYOUT FIXTURES
# =============================================================================


@pytest.fixture
def fake_repo(tmp_path: Path) -> FakeRepo:
    """Repository with en/fr data for both corpora and an English resource.

    The dependency record points at the intl package with a file URI.
    """
    root = tmp_path / "flutter"
    intl_root = tmp_path / "pub-cache" / "intl-0.15.2" / "lib"
    (root / ".git").mkdir(parents=True)

    repo = FakeRepo(root=root, intl_root=intl_root)
    repo.record_path.parent.mkdir(parents=True)
    repo.record_path.write_text(
        "# Generated by pub\n"
        "args:file:///pub-cache/args-1.0.0/lib/\n"
        f"intl:{intl_root.as_uri()}/\n"
        "path:file:///pub-cache/path-1.5.1/lib/\n",
        encoding="utf-8",
    )

    repo.add_data("symbols", "en", {"NAME": "en", "ERAS": ["BC", "AD"]})
    repo.add_data("symbols", "fr", {"NAME": "fr", "ERAS": ["av. J.-C.", "ap. J.-C."]})
    repo.add_data("patterns", "en", {"d": "d", "yMMMd": "MMM d, y"})
    repo.add_data("patterns", "fr", {"d": "d", "yMMMd": "d MMM y"})
    repo.add_resource("material_en.arb")
    return repo
