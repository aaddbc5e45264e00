"""Java class dependency extractor using Tree-sitter."""

from typing import Any

from classdeps.core.exceptions.errors import StructuralError

from ..models import DEFAULT_DECLARATION_KINDS, ClassDepsReport
from ..normalizer import filter_primitives, normalize_type
from ..syntax_tree import node_text
from .base import ClassExtractorBase

# Class body members whose own "type" field names a dependency.
_TYPED_MEMBER_TYPES = {"field_declaration", "constant_declaration", "object_creation_expression"}

_CONSTRUCTOR_TYPES = {"constructor_declaration", "compact_constructor_declaration"}


class JavaClassExtractor(ClassExtractorBase):
    """Extracts per-class dependency reports from a Java syntax tree.

    Only the direct members of a class body are inspected. Method and
    constructor bodies get a shallow scan: local variable declarations,
    return statements and object creations inside expression statements.
    """

    def __init__(self, declaration_kinds: tuple[str, ...] = DEFAULT_DECLARATION_KINDS) -> None:
        """Initialize the extractor.

        Args:
            declaration_kinds: Node kinds treated as class declarations.
        """
        self.declaration_kinds = frozenset(declaration_kinds)

    def extract_package(self, root: Any, content: bytes) -> str | None:
        for child in root.named_children:
            if child.type == "package_declaration":
                for pkg_child in child.named_children:
                    if pkg_child.type in ("scoped_identifier", "identifier"):
                        return node_text(content, pkg_child)
        return None

    def extract_imports(self, root: Any, content: bytes) -> list[str]:
        """Extract import declarations that are direct children of the root.

        ``import a.b.*;`` becomes ``a.b.*`` and ``import static a.B.c;``
        becomes ``static a.B.c``. Imports are not passed through the type
        normalizer.

        Args:
            root: Root AST node.
            content: Source code content.

        Returns:
            Import paths in declaration order.
        """
        imports: list[str] = []

        for child in root.named_children:
            if child.type != "import_declaration" or child.named_child_count == 0:
                continue

            path = node_text(content, child.named_child(0))
            if child.named_child_count > 1 and child.named_child(1).type == "asterisk":
                path = f"{path}.*"
            # "static" is an anonymous token, not a field
            if any(token.type == "static" for token in child.children):
                path = f"static {path}"
            imports.append(path)

        return imports

    def extract_classes(
        self,
        node: Any,
        content: bytes,
        file_imports: list[str],
        parent_name: str = "",
    ) -> list[ClassDepsReport]:
        classes: list[ClassDepsReport] = []

        for child in self._members(node):
            if child.type not in self.declaration_kinds:
                continue

            name_node = child.child_by_field_name("name")
            if name_node is None:
                raise StructuralError(
                    f"{child.type} without a name at line {child.start_point[0] + 1}",
                    node_type=child.type,
                )
            class_name = node_text(content, name_node)
            qualified_name = f"{parent_name}.{class_name}" if parent_name else class_name

            body = child.child_by_field_name("body")
            nested = (
                self.extract_classes(body, content, file_imports, qualified_name)
                if body is not None
                else []
            )

            classes.append(
                ClassDepsReport(
                    class_name=class_name,
                    qualified_name=qualified_name,
                    class_deps=self.collect_dependencies(child, content, file_imports),
                    nested_classes=nested,
                )
            )

        return classes

    def collect_dependencies(
        self, class_node: Any, content: bytes, file_imports: list[str]
    ) -> list[str]:
        """Collect the direct dependencies of one class declaration.

        Args:
            class_node: Class declaration node.
            content: Source code content.
            file_imports: Imports of the enclosing file.

        Returns:
            Sorted, deduplicated dependency names without primitives.
        """
        raw: list[str] = []

        superclass = class_node.child_by_field_name("superclass")
        if superclass is not None:
            raw.append(node_text(content, self._superclass_type(superclass)))

        interfaces = class_node.child_by_field_name("interfaces")
        if interfaces is not None:
            raw.extend(self._type_list_texts(interfaces, content))

        for child in class_node.named_children:
            if child.type == "extends_interfaces":
                raw.extend(self._type_list_texts(child, content))

        # record components
        components = class_node.child_by_field_name("parameters")
        if components is not None:
            raw.extend(self._parameter_types(components, content))

        body = class_node.child_by_field_name("body")
        if body is not None:
            for member in self._members(body):
                raw.extend(self._member_types(member, content))

        deps = list(file_imports)
        for text in raw:
            name = normalize_type(text)
            if name is not None:
                deps.append(name)

        return filter_primitives(sorted(set(deps)))

    def _members(self, node: Any) -> list[Any]:
        """Get the direct named children of a body, unwrapping enum body declarations."""
        members: list[Any] = []
        for child in node.named_children:
            if child.type == "enum_body_declarations":
                members.extend(child.named_children)
            else:
                members.append(child)
        return members

    def _member_types(self, member: Any, content: bytes) -> list[str]:
        """Get raw type texts referenced by one class body member."""
        if member.type in _TYPED_MEMBER_TYPES:
            return self._declared_types(member, content)

        if member.type == "method_declaration":
            types = self._declared_types(member, content)
            types.extend(self._callable_types(member, content))
            return types

        if member.type in _CONSTRUCTOR_TYPES:
            return self._callable_types(member, content)

        return []

    def _callable_types(self, node: Any, content: bytes) -> list[str]:
        """Get parameter and shallow body types of a method or constructor."""
        types: list[str] = []

        parameters = node.child_by_field_name("parameters")
        if parameters is not None:
            types.extend(self._parameter_types(parameters, content))

        body = node.child_by_field_name("body")
        if body is not None:
            types.extend(self._body_types(body, content))

        return types

    def _declared_types(self, node: Any, content: bytes) -> list[str]:
        """Get the "type" field plus the declarator -> value -> type chain.

        Both are kept: ``List<Foo> xs = new ArrayList<>()`` yields
        ``List<Foo>`` and ``ArrayList<>``.
        """
        types: list[str] = []

        type_node = node.child_by_field_name("type")
        if type_node is not None:
            types.append(node_text(content, type_node))

        for declarator in node.children_by_field_name("declarator"):
            value = declarator.child_by_field_name("value")
            if value is None:
                continue
            value_type = value.child_by_field_name("type")
            if value_type is not None:
                types.append(node_text(content, value_type))

        return types

    def _parameter_types(self, params_node: Any, content: bytes) -> list[str]:
        types: list[str] = []

        for param in params_node.named_children:
            if param.type == "formal_parameter":
                type_node = param.child_by_field_name("type")
                if type_node is not None:
                    types.append(node_text(content, type_node))
            elif param.type == "spread_parameter":
                # Foo... args has no "type" field
                for child in param.named_children:
                    if child.type not in ("modifiers", "variable_declarator"):
                        types.append(node_text(content, child))
                        break

        return types

    def _body_types(self, body: Any, content: bytes) -> list[str]:
        """Get types from the top-level statements of a method or constructor body."""
        types: list[str] = []

        for statement in body.named_children:
            if statement.type == "local_variable_declaration":
                types.extend(self._declared_types(statement, content))
            elif statement.type == "return_statement":
                type_node = statement.child_by_field_name("type")
                if type_node is not None:
                    types.append(node_text(content, type_node))
                elif statement.named_child_count > 0:
                    types.extend(self._creation_types(statement.named_child(0), content))
            elif statement.type == "expression_statement":
                if statement.named_child_count > 0:
                    types.extend(self._creation_types(statement.named_child(0), content))
            elif statement.type == "explicit_constructor_invocation":
                types.extend(self._creation_types(statement, content))

        return types

    def _creation_types(self, expr: Any, content: bytes) -> list[str]:
        """Get object creation types in an expression, looking one level down.

        Catches ``new Foo()``, ``x = new Foo()`` and ``obj.call(new Foo())``.
        """
        types: list[str] = []
        candidates: list[Any] = [expr]

        right = expr.child_by_field_name("right")
        if right is not None:
            candidates.append(right)

        arguments = expr.child_by_field_name("arguments")
        if arguments is not None:
            candidates.extend(arguments.named_children)

        for candidate in candidates:
            if candidate.type == "object_creation_expression":
                type_node = candidate.child_by_field_name("type")
                if type_node is not None:
                    types.append(node_text(content, type_node))

        return types

    def _superclass_type(self, superclass: Any) -> Any:
        """Get the type node wrapped by a superclass node (``extends Foo``)."""
        name_node = superclass.child_by_field_name("name")
        if name_node is not None:
            return name_node
        if superclass.named_child_count > 0:
            return superclass.named_child(0)
        return superclass

    def _type_list_texts(self, node: Any, content: bytes) -> list[str]:
        """Get every type text under an implements/extends list node."""
        texts: list[str] = []
        for child in node.named_children:
            if child.type == "type_list":
                texts.extend(node_text(content, t) for t in child.named_children)
            else:
                texts.append(node_text(content, child))
        return texts
