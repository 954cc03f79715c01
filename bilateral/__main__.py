import sys
from .projects import main

sys.exit(main())
