import os, sys
import warnings
from pathlib import Path

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Deterministic configuration regardless of the developer's .env / shell
os.environ.setdefault("DISCORD_API_TOKEN", "test-token")
os.environ.setdefault("TRELLO_KEY", "test-key")
os.environ.setdefault("TRELLO_ACCESS_TOKEN", "test-trello-token")
os.environ.setdefault("RDSS_COMMAND_PREFIX", "rdss:")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings(
    "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
)
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


def pytest_configure(config):
    warnings.filterwarnings(
        "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
    )
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)
