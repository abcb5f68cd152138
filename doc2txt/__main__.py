from doc2txt.main import main

raise SystemExit(main())
