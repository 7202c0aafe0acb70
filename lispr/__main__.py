from lispr.cli import main

raise SystemExit(main())
