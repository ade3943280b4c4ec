"""
Run with: python -m desktopcalc
"""
import sys

from desktopcalc.main import main

sys.exit(main())
