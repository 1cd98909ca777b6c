from gfxlaunch.cli import main

raise SystemExit(main())
