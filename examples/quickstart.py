"""Quickstart example for langresolver.

This example demonstrates basic usage of langresolver: keys, groups,
placeholders, pluralization, JSON catalogs and validation.

Note: get() never raises for a bad key or a malformed template. Use
resolve() or validate_catalog() when you need to see what went wrong.
"""

import json
import logging
import tempfile
from pathlib import Path

from langresolver import JsonCatalogLoader, Lang, init, validate_catalog

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

lang = init({
    "messages": {
        "hello": "Hello, World!",
        "welcome": "Welcome to langresolver!",
    },
})

print(lang.get("hello"))
# Output: Hello, World!

print(lang.get("welcome"))
# Output: Welcome to langresolver!

print(lang.get("not.there"))
# Output: not.there

# Example 2: Replacements
print("\n" + "=" * 50)
print("Example 2: Placeholder Replacement")
print("=" * 50)

lang.set_messages({
    "messages": {
        "greeting": "Hello, :name!",
        "user-info": ":firstName :lastName (Age: :age)",
    },
})

print(lang.get("greeting", {"name": "Alice"}))
# Output: Hello, Alice!

print(lang.get("user-info", {"firstName": "Bob", "lastName": "Smith", "age": 30}))
# Output: Bob Smith (Age: 30)

# Example 3: Groups
print("\n" + "=" * 50)
print("Example 3: Groups")
print("=" * 50)

lang.set_messages({
    "messages": {"home": "Home", "nav.about": "About us"},
    "errors": {"not-found": "Page not found"},
})

print(lang.get("errors.not-found"))
# Output: Page not found

print(lang.get("home"))
# Output: Home

print(lang.get("nav.about"))
# Output: About us ("nav" is not a group, so the whole key is the entry)

# Example 4: Two-way pluralization
print("\n" + "=" * 50)
print("Example 4: Two-way Pluralization")
print("=" * 50)

lang.set_messages({"messages": {"emails": "You have one email|You have :count emails"}})

for count in (1, 5):
    print(lang.choice("emails", count))
# Output: You have one email
# Output: You have 5 emails

# Example 5: Explicit rules
print("\n" + "=" * 50)
print("Example 5: Explicit Interval Rules")
print("=" * 50)

lang.set_messages({
    "messages": {
        "apples": "{0}No apples|{1}One apple|[2,4]A few apples|[5,*]:count apples",
    },
})

for count in (0, 1, 3, 12):
    print(lang.choice("apples", count))
# Output: No apples
# Output: One apple
# Output: A few apples
# Output: 12 apples

# Example 6: Diagnostics
print("\n" + "=" * 50)
print("Example 6: Malformed Templates")
print("=" * 50)

lang.set_messages({"messages": {"broken": "{0}none|[1,In]some"}})

text, diagnostics = lang.resolve("broken", count=1)
print(text)
# Output: {0}none|[1,In]some
for diagnostic in diagnostics:
    print(diagnostic.format_error())

# Example 7: Loading from JSON
print("\n" + "=" * 50)
print("Example 7: Loading from JSON")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    catalog_dir = Path(tmp) / "en"
    catalog_dir.mkdir()
    (catalog_dir / "messages.json").write_text(
        json.dumps({"hi": "Hi :name"}), encoding="utf-8"
    )
    (catalog_dir / "errors.json").write_text(
        json.dumps({"missing": "Not found|[2,*]bad"}), encoding="utf-8"
    )

    loader = JsonCatalogLoader(catalog_dir)
    file_lang = Lang(provider=loader)
    print(file_lang.get("hi", {"name": "Ann"}))
    # Output: Hi Ann

    # Example 8: Validation
    print("\n" + "=" * 50)
    print("Example 8: Catalog Validation")
    print("=" * 50)

    result = validate_catalog(loader.load())
    print(result.format())
    # Output: Errors (1): ... errors.missing ...
