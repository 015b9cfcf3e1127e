import os

# Absolute path to project root
# (a stable anchor for all file paths)
basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")

    # The two tabular resources. Each may be a path or an http(s) URL.
    DATA_DIR = os.environ.get("DATA_DIR", os.path.join(basedir, "static", "data"))
    SYLLABUS_SOURCE = os.environ.get("SYLLABUS_SOURCE", os.path.join(DATA_DIR, "syllabus.csv"))
    RELATION_SOURCE = os.environ.get("RELATION_SOURCE", os.path.join(DATA_DIR, "relation.csv"))

    # Seconds; only used for URL sources
    FETCH_TIMEOUT = float(os.environ.get("FETCH_TIMEOUT", "10"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
