"""Allow running the package with python -m dglog (same as the dglog console script)."""
from dglog.main import main
import sys
sys.exit(main())
