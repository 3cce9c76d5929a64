"""
Scope classification on real Go sources.
"""

from tests.infrastructure import parse, classification


def assert_scopes(code: str, expected: dict):
    result = classification(parse(code))
    assert set(result) == set(expected), f"unexpected comments: {set(result) ^ set(expected)}"
    for text, inside in expected.items():
        assert result[text] is inside, f"{text!r}: expected inside={inside}"


def test_function_bodies_and_doc_comments():
    assert_scopes("""
    package main

    // Package-level comment
    // Another package comment

    // Example is documented
    func Example() {
        // Inside the body
        x := 1 // Inline inside the body
        _ = x

        /*
         * Multi-line inside
         */
    }

    // Method doc
    func (s S) Method() {
        // Method body
    }

    // Comment before a type
    type T int

    // Comment between funcs
    """, {
        "// Package-level comment": False,
        "// Another package comment": False,
        "// Example is documented": False,
        "// Inside the body": True,
        "// Inline inside the body": True,
        "/*\n     * Multi-line inside\n     */": True,
        "// Method doc": False,
        "// Method body": True,
        "// Comment before a type": False,
        "// Comment between funcs": False,
    })


def test_function_boundaries():
    assert_scopes("""
    package main

    func BoundaryFunc() { // Same line as opening brace
        x := 1
        _ = x
    } // Same line as closing brace

    func MultiLineDef(
        // In parameter list
        param1 string,
        param2 int, // Inline in parameter list
    ) {
        // In body
    }
    """, {
        "// Same line as opening brace": True,
        "// Same line as closing brace": False,
        "// In parameter list": False,
        "// Inline in parameter list": False,
        "// In body": True,
    })


def test_nested_blocks_and_closures():
    assert_scopes("""
    package main

    func Outer() {
        // Outer comment
        for i := 0; i < 10; i++ {
            // Loop comment
        }
        inner := func() {
            // Inner comment
            deeper := func() {
                // Deeper comment
            }
            deeper()
        }
        inner()
    }
    """, {
        "// Outer comment": True,
        "// Loop comment": True,
        "// Inner comment": True,
        "// Deeper comment": True,
    })


def test_generic_function():
    assert_scopes("""
    package main

    // Generic is documented
    func Generic[T any](param T) {
        // Inside generic function
    }
    """, {
        "// Generic is documented": False,
        "// Inside generic function": True,
    })


def test_struct_bodies():
    assert_scopes("""
    package main

    // Remote is documented
    type Remote struct {
        // Before first field
        client string
        // Between fields
        host string // Trailing field comment
    }

    type Shape interface {
        // Interface method comment
        Area() float64
    }
    """, {
        "// Remote is documented": False,
        "// Before first field": True,
        "// Between fields": True,
        "// Trailing field comment": True,
        "// Interface method comment": False,
    })


def test_grouped_and_single_declarations():
    assert_scopes("""
    package main

    // Doc for the var group
    var (
        // Inside var group
        a = 1
        b = 2 // Trailing in var group
    )

    // Doc for the const group
    const (
        // Inside const group
        C = iota
    )

    var single = 1 // Single var
    const one = 1 // Single const
    """, {
        "// Doc for the var group": False,
        "// Inside var group": True,
        "// Trailing in var group": True,
        "// Doc for the const group": False,
        "// Inside const group": True,
        "// Single var": False,
        "// Single const": False,
    })


def test_top_level_function_literal():
    assert_scopes("""
    package main

    // Handler is documented
    var Handler = func() {
        // Inside literal
    }
    """, {
        "// Handler is documented": False,
        "// Inside literal": True,
    })


def test_anonymous_struct_in_var():
    assert_scopes("""
    package main

    var cfg = struct {
        // Anonymous struct field
        Name string
    }{Name: "x"}
    """, {
        "// Anonymous struct field": True,
    })
