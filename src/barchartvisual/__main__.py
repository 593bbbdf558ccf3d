"""Run with: python -m barchartvisual [data.json|data.csv]"""
import sys

from barchartvisual.main import main

sys.exit(main())
