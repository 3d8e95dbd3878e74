"""
Lesson app entrypoint

Usage:
    python -m viz_lesson            # hands the process to `streamlit run`
    streamlit run viz_lesson/main.py
"""

import os
import subprocess
import sys
from pathlib import Path

from viz_lesson import main as app_main


def launch(argv=None):
    """Render directly under Streamlit, otherwise exec `python -m streamlit run main.py`"""
    args = list(sys.argv[1:] if argv is None else argv)

    if os.environ.get("STREAMLIT_SERVER_PORT"):
        app_main.main()
        return

    app_path = Path(app_main.__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)] + args
    try:
        os.execv(sys.executable, cmd)
    except OSError:
        # execv is unavailable on some platforms
        sys.exit(subprocess.call(cmd))


if __name__ == "__main__":
    launch()
