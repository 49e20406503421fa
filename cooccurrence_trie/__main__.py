import sys

from cooccurrence_trie.cli import main

sys.exit(main())
