from gh_activity.cli import main

raise SystemExit(main())
