import os
import tomllib
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Path to config.toml inside the package
CONFIG_FILE = Path(__file__).resolve().parent / "config.toml"

TRUTHY = {"1", "true", "yes", "on"}


def load_toml(path=CONFIG_FILE):
    """Load and parse the TOML config file."""
    try:
        with Path(path).open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise RuntimeError(f"Config file not found: {path}")
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Invalid TOML in {path}: {e}")


def env_list(name, default):
    value = os.getenv(name)
    if value is None:
        return tuple(default)
    return tuple(item.strip() for item in value.split(",") if item.strip())


def env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return bool(default)
    return value.strip().lower() in TRUTHY


# Load TOML contents
raw = load_toml()


# -------------------------------
#  SUFFIX LIST CONFIG
# -------------------------------
suffix_list = raw.get("suffix_list", {})

SUFFIX_LIST_URLS = env_list("DOMAINSAGE_SUFFIX_LIST_URLS", suffix_list.get("suffix_list_urls", []))
SUFFIX_CACHE_DIR = os.getenv("DOMAINSAGE_CACHE_DIR", suffix_list.get("cache_dir", "")) or None
INCLUDE_PRIVATE_DOMAINS = env_flag(
    "DOMAINSAGE_INCLUDE_PRIVATE_DOMAINS",
    suffix_list.get("include_private_domains", False)
)
FALLBACK_TO_SNAPSHOT = bool(suffix_list.get("fallback_to_snapshot", True))
EXTRA_SUFFIXES = tuple(suffix_list.get("extra_suffixes", []))


# -------------------------------
#  PARSING CONFIG
# -------------------------------
parsing = raw.get("parsing", {})

DEFAULT_SCHEME = parsing.get("default_scheme", "https://")
WWW_SUBDOMAIN = parsing.get("www_subdomain", "www")
VALIDATION_MODES = tuple(parsing.get("validation_modes", ["standard", "root_domain", "root_or_custom_subdomain"]))


# -------------------------------
#  LOGGING CONFIG
# -------------------------------
logging_section = raw.get("logging", {})

LOG_LEVEL = os.getenv("DOMAINSAGE_LOG_LEVEL", logging_section.get("level", "WARNING"))
LOG_FORMAT = os.getenv("DOMAINSAGE_LOG_FORMAT", logging_section.get("format", "console"))
