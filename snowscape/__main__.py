from snowscape.cli import main

raise SystemExit(main())
