from rodrigues._cli import main

raise SystemExit(main())
