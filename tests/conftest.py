import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
	"""Keep FRONTMATTER_* variables from the host out of tests."""
	for name in ("FRONTMATTER_FORMATS", "FRONTMATTER_STRICT"):
		monkeypatch.delenv(name, raising=False)
