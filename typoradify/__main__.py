from typoradify.main import main

raise SystemExit(main())
