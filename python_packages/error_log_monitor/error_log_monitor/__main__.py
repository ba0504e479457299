import sys

from error_log_monitor.cli import main

sys.exit(main())
