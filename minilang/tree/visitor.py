from minilang.token import Token
from minilang.tree.tree import Node


class YieldVisitor:
    """
    For yielding values from nodes in our tree
    """

    def visit(self, node: Node | Token, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node | Token, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        if isinstance(node, Token):
            return
        for field, value in node.iter_fields():
            if isinstance(value, (list, tuple)):
                for item in value:
                    if isinstance(item, (Node, Token)):
                        yield from self.visit(item, *args, **kwargs)

            elif isinstance(value, (Node, Token)):
                yield from self.visit(value, *args, **kwargs)
