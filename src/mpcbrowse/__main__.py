from mpcbrowse.cli import main

raise SystemExit(main())
