import sys

from src.scenario.demo import main

sys.exit(main())
