from trigger_codegen.main import main

raise SystemExit(main())
