# Руководство к файлу
# Назначение: запуск через `python -m titlextractor`.

import sys

from titlextractor.cli.main import main


sys.exit(main())
