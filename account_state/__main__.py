import sys

from account_state.demo import main

sys.exit(main())
