# encoding: utf-8
from mo_grammar.nodes import IterationNode, TerminalNode
from mo_grammar.utils import Log, positional_range, recursion_limit

# DEFAULT ACTIONS, USED WHEN A NODE HAS NO ACTION OF ITS OWN
SPECIAL_ACTIONS = {"_terminal", "_iter", "_nonterminal"}


class Semantics(object):
    """
    A family of operations over the concrete syntax trees of one grammar.

    An operation maps node names (rule names, and ``<rule>_<case>`` for
    cases) to actions.  An action is called with the already evaluated
    children of its node: the matched text for terminals, a tuple for
    iterations, and the action result for everything else.  A node without
    an action passes its only child through, so only nodes with zero, or
    more than one, child need an action.

    Example::

        semantics = Semantics(grammar).add_operation("tree", {
            "Program": lambda body, _: Program(body),
            "Exp_binary": lambda left, op, right: BinaryExpression(left, op, right),
        })
        semantics(grammar.match("x + 1")).tree()
    """

    def __init__(self, grammar):
        self.grammar = grammar
        self.operations = {}

    def add_operation(self, name, actions):
        if name in self.operations:
            Log.error("Operation {{name}} is already defined", name=name)
        if name.startswith("_"):
            Log.error("Operation name {{name}} can not start with underscore", name=name)
        self.operations[name] = Operation(self.grammar, name, actions)
        return self

    def __call__(self, match):
        if match.grammar is not self.grammar:
            Log.error(
                "Expecting a match from grammar {{expected}}, not {{actual}}",
                expected=self.grammar.name,
                actual=match.grammar.name,
            )
        if match.failed():
            raise match.exception
        return Evaluation(self, match.node)


class Operation(object):
    def __init__(self, grammar, name, actions):
        self.grammar = grammar
        self.name = name
        self.actions = dict(actions)

        arities = grammar.node_arities()
        reachable = grammar.reachable_nodes()
        for key, action in self.actions.items():
            if not callable(action):
                Log.error("Semantic action for {{key}} is not callable", key=key)
            if key in SPECIAL_ACTIONS:
                continue
            if key not in arities:
                Log.error(
                    "Found semantic action for {{key}}, which is not a rule in grammar {{grammar}}",
                    key=key,
                    grammar=grammar.name,
                )
            arity = arities[key]
            min_args, max_args = positional_range(action)
            if not (min_args <= arity <= max_args):
                Log.error(
                    "Semantic action for {{key}} has the wrong number of parameters, expecting {{arity}}",
                    key=key,
                    arity=arity,
                )
            if key not in reachable:
                Log.warning(
                    "Semantic action for {{key}} is never used by grammar {{grammar}}",
                    key=key,
                    grammar=grammar.name,
                )

        if "_nonterminal" not in self.actions:
            missing = sorted(k for k in reachable if arities[k] != 1 and k not in self.actions)
            if missing:
                Log.error(
                    "Missing semantic action for {{names}} in operation {{name}}",
                    names=", ".join(missing),
                    name=name,
                )

    def __call__(self, node):
        # ACTIONS MAY RECURSE AS DEEP AS THE TREE (make_tree DOES)
        with recursion_limit(self.grammar.frames_needed(node.string)):
            return self.evaluate(node)

    def evaluate(self, node):
        """
        APPLY THE ACTIONS BOTTOM-UP; AN EXPLICIT STACK, SO TREE DEPTH IS NOT LIMITED BY THE PYTHON STACK
        """
        results = []
        todo = [(node, False)]
        while todo:
            n, expanded = todo.pop()
            if isinstance(n, TerminalNode):
                results.append(self._terminal(n))
            elif expanded:
                count = len(n.children)
                children = results[len(results) - count :]
                del results[len(results) - count :]
                results.append(self._combine(n, children))
            else:
                todo.append((n, True))
                todo.extend((c, False) for c in reversed(n.children))
        return results[0]

    def _terminal(self, node):
        action = self.actions.get("_terminal")
        if action:
            return action(node.source)
        return node.source

    def _combine(self, node, children):
        if isinstance(node, IterationNode):
            action = self.actions.get("_iter")
            if action:
                return action(*children)
            return tuple(children)

        action = self.actions.get(node.name) or self.actions.get("_nonterminal")
        if action:
            return action(*children)
        if len(children) == 1:
            return children[0]
        Log.error("Missing semantic action for {{name}}", name=node.name)


class Evaluation(object):
    """
    A matched tree, ready for any operation of the semantics: ``evaluation.tree()``
    """

    def __init__(self, semantics, node):
        self.semantics = semantics
        self.node = node

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)
        operation = self.semantics.operations.get(item)
        if operation is None:
            Log.error(
                "No operation {{name}} in the semantics of {{grammar}}",
                name=item,
                grammar=self.semantics.grammar.name,
            )
        return lambda: operation(self.node)
