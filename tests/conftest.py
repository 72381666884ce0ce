import os
import tempfile

# web.app opens its store at import time; keep it out of the project data dir.
os.environ.setdefault(
    "DRAFTBOARD_DB_PATH",
    os.path.join(tempfile.mkdtemp(prefix="draftboard-test-"), "draftboard.db"),
)
os.environ.setdefault("DRAFTBOARD_HERO_CATALOG", os.path.join(tempfile.gettempdir(), "no-heroes.json"))
