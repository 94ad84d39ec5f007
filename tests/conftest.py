import sys
from pathlib import Path

# Add project root so `import closure_alpha` and `import tools` work in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
