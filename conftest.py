import sys
from pathlib import Path

# Ensure the repository root is importable when running pytest without installing
ROOT_DIR = Path(__file__).resolve().parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))
