from __future__ import annotations

from servelite.main import main

raise SystemExit(main())
