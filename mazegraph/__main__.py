from mazegraph.controllers.cli import main

raise SystemExit(main())
