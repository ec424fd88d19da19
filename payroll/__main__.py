# payroll/__main__.py
import sys

from payroll.main_app import main

sys.exit(main())
