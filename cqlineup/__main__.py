from cqlineup.cli.repl import main

raise SystemExit(main())
