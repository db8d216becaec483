from property_documenter.cli import main

raise SystemExit(main())
