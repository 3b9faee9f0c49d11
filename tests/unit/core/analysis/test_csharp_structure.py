from __future__ import annotations

"""
Unit tests for structural extraction from real C# sources.

Parses snippets with the tree-sitter C# grammar and checks the records the
walker produces for typical Unity scripts.
"""

from typing import Iterable, List, Tuple

from unitycodemap.core.analysis.structure_walker import extract_records
from unitycodemap.core.analysis.syntax_provider import parse_source


def rows(
        source: str,
        path: str = "Assets/Test.cs",
        defines: Iterable[str] = (),
) -> List[Tuple[str, str, str, str]]:
    """Helper returning report rows for a snippet."""
    root = parse_source(source.encode("utf-8"), file_path=path)
    return [r.as_row() for r in extract_records(root, path, defines)]


def test_class_with_single_method():
    source = """
public class Foo
{
    public void Bar() { }
}
"""
    assert rows(source, "Foo.cs") == [
        ("Foo.cs", "Foo", "Foo", "Class"),
        ("Foo.cs", "Foo", "Bar", "Method"),
    ]


def test_nested_class_field_belongs_to_inner():
    source = """
class Outer
{
    class Inner
    {
        int x;
    }
}
"""
    assert rows(source, "f") == [
        ("f", "Outer", "Outer", "Class"),
        ("f", "Inner", "Inner", "Class"),
        ("f", "Inner", "x", "Field"),
    ]


def test_co_declared_fields():
    source = """
class C
{
    public int A, B;
}
"""
    assert rows(source, "f")[1:] == [
        ("f", "C", "A", "Field"),
        ("f", "C", "B", "Field"),
    ]


def test_unity_behaviour_members_in_document_order():
    source = """
using UnityEngine;

namespace Game.Actors
{
    public class Player : MonoBehaviour
    {
        [SerializeField] private float speed = 5f;
        public const int MaxLives = 3;
        public int Health { get; private set; }
        public bool IsAlive => Health > 0;

        public Player()
        {
        }

        static Player()
        {
        }

        private void Update()
        {
        }

        public T Find<T>() where T : Component
        {
            return GetComponent<T>();
        }
    }
}
"""
    assert rows(source, "P.cs") == [
        ("P.cs", "Player", "Player", "Class"),
        ("P.cs", "Player", "speed", "Field"),
        ("P.cs", "Player", "MaxLives", "Field"),
        ("P.cs", "Player", "Health", "Property"),
        ("P.cs", "Player", "IsAlive", "Property"),
        ("P.cs", "Player", "Player", "Constructor"),
        ("P.cs", "Player", "Player", "Constructor"),
        ("P.cs", "Player", "Update", "Method"),
        ("P.cs", "Player", "Find", "Method"),
    ]


def test_struct_and_sibling_types():
    source = """
public struct Stats
{
    public int Strength;
    public Stats(int strength) { Strength = strength; }
}

public class Inventory
{
    private int _count;
}
"""
    assert rows(source, "f") == [
        ("f", "Stats", "Stats", "Struct"),
        ("f", "Stats", "Strength", "Field"),
        ("f", "Stats", "Stats", "Constructor"),
        ("f", "Inventory", "Inventory", "Class"),
        ("f", "Inventory", "_count", "Field"),
    ]


def test_context_returns_to_outer_after_nested_type():
    source = """
class Outer
{
    struct Node
    {
        public int Value;
    }

    void Traverse() { }
}
"""
    assert rows(source, "f") == [
        ("f", "Outer", "Outer", "Class"),
        ("f", "Node", "Node", "Struct"),
        ("f", "Node", "Value", "Field"),
        ("f", "Outer", "Traverse", "Method"),
    ]


def test_top_level_interface_members_are_skipped():
    source = """
public interface IDamageable
{
    void TakeDamage(int amount);
    int Armor { get; }
}
"""
    assert rows(source) == []


def test_interface_and_enum_only_files_produce_nothing():
    source = """
namespace Game
{
    public enum State { Idle, Running }
}
"""
    assert rows(source) == []


def test_local_functions_and_destructors_are_not_members():
    source = """
class Worker
{
    ~Worker() { }

    void Run()
    {
        int Helper() { return 1; }
        Helper();
    }
}
"""
    assert rows(source, "f") == [
        ("f", "Worker", "Worker", "Class"),
        ("f", "Worker", "Run", "Method"),
    ]


def test_generic_class_and_verbatim_identifier():
    source = """
public class Pool<T> where T : class
{
    private int @class;
}
"""
    assert rows(source, "f") == [
        ("f", "Pool", "Pool", "Class"),
        ("f", "Pool", "class", "Field"),
    ]


def test_partially_invalid_source_is_still_walked():
    """Syntax errors are tolerated outside strict mode."""
    source = """
class Intact
{
    void Ok() { }
}
}
"""
    result = rows(source, "f")

    assert result[:2] == [
        ("f", "Intact", "Intact", "Class"),
        ("f", "Intact", "Ok", "Method"),
    ]


def test_every_type_yields_at_least_one_record():
    source = """
class A { class B { struct C { } } }
struct D { }
"""
    result = rows(source, "f")

    type_rows = [r for r in result if r[3] in ("Class", "Struct")]
    assert [r[2] for r in type_rows] == ["A", "B", "C", "D"]
    assert all(r[1] == r[2] for r in type_rows)
    assert len(result) >= len(type_rows)


# -----------------------------------------------------------------------------
# CONDITIONAL COMPILATION
# -----------------------------------------------------------------------------

EDITOR_ONLY = """
#if UNITY_EDITOR
public class FooEditor : Editor
{
    public override void OnInspectorGUI() { }
}
#endif

public class Foo
{
}
"""

IF_ELSE_METHODS = """
public class Spawner : MonoBehaviour
{
#if UNITY_EDITOR
    void OnValidate() { Debug.Log("editor"); }
#else
    void OnValidate() { }
#endif
    void Start() { }
}
"""


def test_editor_only_class_is_skipped_by_default():
    assert rows(EDITOR_ONLY, "f") == [("f", "Foo", "Foo", "Class")]


def test_editor_only_class_with_symbol_defined():
    assert rows(EDITOR_ONLY, "f", defines=["UNITY_EDITOR"]) == [
        ("f", "FooEditor", "FooEditor", "Class"),
        ("f", "FooEditor", "OnInspectorGUI", "Method"),
        ("f", "Foo", "Foo", "Class"),
    ]


def test_if_else_branches_yield_a_single_member():
    assert rows(IF_ELSE_METHODS, "f") == [
        ("f", "Spawner", "Spawner", "Class"),
        ("f", "Spawner", "OnValidate", "Method"),
        ("f", "Spawner", "Start", "Method"),
    ]
    assert rows(IF_ELSE_METHODS, "f", defines=["UNITY_EDITOR"]) == rows(IF_ELSE_METHODS, "f")


def test_negated_condition_is_active():
    source = """
public class Runtime
{
#if !UNITY_EDITOR
    int buildOnly;
#endif
}
"""
    assert rows(source, "f") == [
        ("f", "Runtime", "Runtime", "Class"),
        ("f", "Runtime", "buildOnly", "Field"),
    ]
    assert rows(source, "f", defines=["UNITY_EDITOR"]) == [("f", "Runtime", "Runtime", "Class")]


def test_elif_chain_picks_first_active_branch():
    source = """
public class Platform
{
#if UNITY_IOS
    void Ios() { }
#elif UNITY_ANDROID || UNITY_STANDALONE
    void Mobile() { }
#else
    void Fallback() { }
#endif
}
"""
    assert [r[2] for r in rows(source, "f")] == ["Platform", "Fallback"]
    assert [r[2] for r in rows(source, "f", defines=["UNITY_STANDALONE"])] == ["Platform", "Mobile"]
    assert [r[2] for r in rows(source, "f", defines=["UNITY_IOS", "UNITY_ANDROID"])] == ["Platform", "Ios"]


def test_boolean_conditions():
    source = """
class Flags
{
#if true && (DEBUG || false)
    int a;
#endif
#if false
    int b;
#endif
}
"""
    assert [r[2] for r in rows(source, "f")] == ["Flags"]
    assert [r[2] for r in rows(source, "f", defines=["DEBUG"])] == ["Flags", "a"]


def test_define_directive_in_file_enables_branch():
    source = """#define TOOLS
class Cheats
{
#if TOOLS
    void GodMode() { }
#endif
}
"""
    assert [r[2] for r in rows(source, "f")] == ["Cheats", "GodMode"]


def test_unicode_escaped_identifier_is_decoded():
    source = """
class Escaped
{
    public int \\u0041bc;
}
"""
    assert rows(source, "f")[1] == ("f", "Escaped", "Abc", "Field")
