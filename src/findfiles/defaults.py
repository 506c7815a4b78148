"""
Default values shared by the CLI, the archive fetcher and the scanner.
"""

# region ---[ Run Paths ]---

DEFAULT_RUN_PATH = "."
DEFAULT_DOWNLOAD_DIR = "downloaded_repo"

# endregion ---[ Run Paths ]---

# region ---[ GitHub ]---

GITHUB_HOST = "github.com"
GITHUB_BASE_URL = f"https://{GITHUB_HOST}"
DEFAULT_BRANCH = "main"
TREE_SEGMENT = "tree"

# Seconds. A rate-limited download is retried once if GitHub asks us to wait at most this long.
MAX_WAIT_SECONDS = 180
REQUEST_TIMEOUT = (10, 300)
DOWNLOAD_CHUNK_SIZE = 64 * 1024
ARCHIVE_FILENAME = "repo.zip"

# endregion ---[ GitHub ]---

# region ---[ Scanning ]---

DEFAULT_EXTENSIONS: list[str] = []
DEFAULT_IGNORED_DIRS: list[str] = []
DEFAULT_PRINT_CONTENTS = False
DEFAULT_VERBOSITY = 0
SEPARATOR_WIDTH = 50

# endregion ---[ Scanning ]---
