from kcse_scoreboard.cli import main

raise SystemExit(main())
