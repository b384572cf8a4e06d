"""Quickstart example for localedata.

Builds a throwaway resources tree, then demonstrates the three lookup kinds,
memoization, custom overrides, and locale canonicalization.
"""

import tempfile
from pathlib import Path

from localedata import Loader, LoaderConfig, ResourceGroup, ResourceNotFoundError

with tempfile.TemporaryDirectory() as tmp:
    root = Path(tmp)
    (root / "locales" / "zh-Hant").mkdir(parents=True)
    (root / "locales" / "zh-Hant" / "numbers.yml").write_text(
        ":symbols:\n  :decimal: '.'\n  :group: ','\n", encoding="utf-8"
    )
    (root / "shared").mkdir()
    (root / "shared" / "units.yml").write_text("km: 1000\nm: 1\n", encoding="utf-8")
    (root / "shared" / "segments.txt").write_text("\\p{L}+\n", encoding="utf-8")
    (root / "custom" / "shared").mkdir(parents=True)
    (root / "custom" / "shared" / "units.yml").write_text("mi: 1609\n", encoding="utf-8")

    loader = Loader(LoaderConfig.with_custom_subdir(root))

    # Example 1: Locale resource, any spelling of the locale
    print("=" * 50)
    print("Example 1: Locale Resource")
    print("=" * 50)
    numbers = loader.get_locale_resource("zh-tw", "numbers")
    print(numbers)
    # Output: {'symbols': {'decimal': '.', 'group': ','}}
    print(numbers is loader.get_locale_resource("ZH_TW", "numbers"))
    # Output: True

    # Example 2: Structured resource merged with its override
    print("\n" + "=" * 50)
    print("Example 2: Custom Override")
    print("=" * 50)
    print(loader.get_yaml_resource(ResourceGroup.SHARED, "units"))
    # Output: {'km': 1000, 'm': 1, 'mi': 1609}

    # Example 3: Plain text, returned verbatim
    print("\n" + "=" * 50)
    print("Example 3: Plain Resource")
    print("=" * 50)
    print(repr(loader.get_plain_resource("shared/segments.txt")))
    # Output: '\\p{L}+\n'

    # Example 4: Missing resource
    print("\n" + "=" * 50)
    print("Example 4: Missing Resource")
    print("=" * 50)
    try:
        loader.get_yaml_resource("shared", "calendars")
    except ResourceNotFoundError as e:
        print(e)
        # Output: Resource 'shared/calendars.yml' not found.

    print("\nCache:", loader.get_cache_stats())
