from specprune.cli import main

raise SystemExit(main())
