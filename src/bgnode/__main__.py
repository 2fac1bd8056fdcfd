from bgnode.cli import main

raise SystemExit(main())
