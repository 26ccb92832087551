import logging
import re
from pathlib import Path

logger = logging.getLogger("scrapedo")


def get_version():
    try:
        package_path = Path(__file__).parents[1]
        version_file = (package_path / "__init__.py").read_text()
        version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
        if version_match:
            return version_match.group(1).strip()
        return "0.x.x"
    except OSError as e:
        logger.debug("Failed to get version from __init__.py: %s", e)
        return "0.x.x"
