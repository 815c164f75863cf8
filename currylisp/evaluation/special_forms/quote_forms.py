from currylisp import SExpression, LispValue, EvaluatorFn
from currylisp.errors import ArityError, LispSyntaxError
from currylisp.types.pair import ListBuilder, Pair, to_list
from currylisp.types.quoting import Backquoted, Comma, CommaSplice, Quoted


def eval_backquote(
    evaluate_fn: EvaluatorFn,
    expr: SExpression,
    env,
    depth: int = 1,
) -> SExpression:
    """Build the value of a backquoted template.

    At depth 1 a ,x is replaced by the value of x and a ,@x inside a list is
    replaced by the elements of the list x evaluates to. Nested backquotes
    raise the depth; commas at a deeper level are rebuilt, not evaluated.
    """
    match expr:
        case Comma(value=inner):
            if depth == 1:
                return evaluate_fn(inner, env)
            return Comma(eval_backquote(evaluate_fn, inner, env, depth - 1))

        case CommaSplice(value=inner):
            if depth == 1:
                raise LispSyntaxError(",@ is only valid inside a list within backquote")
            return CommaSplice(eval_backquote(evaluate_fn, inner, env, depth - 1))

        case Backquoted(value=inner):
            return Backquoted(eval_backquote(evaluate_fn, inner, env, depth + 1))

        case Quoted(value=inner):
            return Quoted(eval_backquote(evaluate_fn, inner, env, depth))

        case Pair():
            builder = ListBuilder()
            cell: SExpression = expr
            while isinstance(cell, Pair):
                item = cell.car
                if isinstance(item, CommaSplice) and depth == 1:
                    spliced = evaluate_fn(item.value, env)
                    builder.extend(to_list(spliced, "value of ,@"))
                else:
                    builder.append(eval_backquote(evaluate_fn, item, env, depth))
                cell = cell.cdr
            return builder.build(eval_backquote(evaluate_fn, cell, env, depth))

    # Non-list atoms returned as-is
    return expr


def quote_form(tail: list[SExpression], env, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise ArityError("quote expects exactly 1 argument")
    return tail[0]
