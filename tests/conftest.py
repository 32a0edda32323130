import os
import tempfile

# Keep test runs from writing into the working directory's logs/ before the app is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="funnections-logs-"))
