from bracket_tax.cli import main

raise SystemExit(main())
