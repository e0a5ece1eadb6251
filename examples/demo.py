"""
jsontoolkit demonstration script.
"""

import json
import logging

import jsontoolkit
from jsontoolkit import JsonPath, PathSyntaxError, QueryConfig, SecurityError

DOCUMENT = json.loads(
    """
{
    "server": {"host": "localhost", "port": 8080, "ssl": false},
    "users": [
        {"name": "John", "age": 30, "role": "admin"},
        {"name": "Jane", "age": 25, "role": "dev"},
        {"name": "Omar", "age": 41, "role": "dev"}
    ],
    "features": ["auth", "logging", "metrics"]
}
"""
)


def main():
    print("jsontoolkit - Path Query Demo")
    print("=" * 40)

    examples = [
        ("$.server.port", "Property access"),
        ("$.users[*].name", "Wildcard over an array"),
        ("$.features[1]", "Array index"),
        ("$..name", "Recursive descent"),
        ("$.users[?(@.age > 28)].name", "Numeric filter"),
        ("$.users[?(@.role == 'dev')].name", "String filter"),
        ("$['server']['ssl']", "Bracket notation"),
        ("$.users[10].name", "Out of range index (no matches)"),
    ]

    for i, (expression, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Query:  {expression}")
        for match in jsontoolkit.query(DOCUMENT, expression):
            print(f"Match:  {match.path} = {match.value!r}")

    print(f"\n{len(examples) + 1}. First match only")
    first = jsontoolkit.query_first(DOCUMENT, "$.users[?(@.age < 40)]")
    print(f"Output: {first.value if first else None}")

    print("\nError reporting")
    print("-" * 40)
    for expression in ["users[0]", "$.users[0", "$.users[-1]", "$[?(@.age = 30)]"]:
        try:
            jsontoolkit.query(DOCUMENT, expression)
        except PathSyntaxError as e:
            print(f"\nQuery:  {expression}")
            print(f"Error:  {e}")

    try:
        jsontoolkit.query(DOCUMENT, "$" + ".a" * 20, QueryConfig(max_segments=5))
    except SecurityError as e:
        print(f"\nLimit:  {e}")

    print("\nCached engine")
    print("-" * 40)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    engine = JsonPath(QueryConfig(cache_size=16))
    for _ in range(3):
        engine.query(DOCUMENT, "$.users[*].age").values()
    print(engine.cache_info())


if __name__ == "__main__":
    main()
