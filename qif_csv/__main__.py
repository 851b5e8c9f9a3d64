from qif_csv.cli import main

raise SystemExit(main())
