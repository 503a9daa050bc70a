from gps2ned.cli import main

raise SystemExit(main())
