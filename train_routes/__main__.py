import sys

from train_routes.main import main

sys.exit(main())
