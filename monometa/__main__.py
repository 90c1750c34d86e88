from monometa.cli import main

raise SystemExit(main())
