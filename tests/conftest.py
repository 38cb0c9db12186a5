import os
import tempfile

# must happen before db.py is imported anywhere
_TMP = tempfile.mkdtemp(prefix="integral-quiz-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP}/test.db"

import models  # noqa: E402,F401
from db import Base, engine  # noqa: E402

Base.metadata.create_all(engine)
