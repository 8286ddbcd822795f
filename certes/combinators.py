"""
Classical combinators, curried one argument at a time.

Each combinator has its single-letter name from combinatory logic and a
descriptive alias:

    A  apply      (f)(x)     -> f(x)
    B  compose    (f)(g)(x)  -> f(g(x))
    C  flip       (f)(a)(b)  -> f(b)(a)
    I  identity   (x)        -> x
    K  constant   (a)(b)     -> a
    V  pair       (a)(b)(f)  -> f(a)(b)
    T  apply_to   (x)(f)     -> f(x)
"""


def A(f):
    """Apply a unary function: A(f)(x) == f(x)"""
    return lambda x: f(x)


def B(f):
    """
    Right-to-left composition: B(f)(g)(x) == f(g(x)).

        >>> B(lambda x: x + 1)(lambda x: x * 2)(5)
        11
    """
    return lambda g: lambda x: f(g(x))


def C(f):
    """
    Swap the two arguments of a curried binary function.

        >>> divide = lambda a: lambda b: a / b
        >>> C(divide)(2)(10)
        5.0
    """
    return lambda b: lambda a: f(a)(b)


def I(x):  # noqa: E741
    return x


def K(a):
    """Constant: K(a)(b) == a for every b"""
    return lambda _b: a


def V(a):
    """
    Pair two values for a later binary function: V(a)(b)(f) == f(a)(b).

        >>> V(6)(7)(lambda a: lambda b: a * b)
        42
    """
    return lambda b: lambda f: f(a)(b)


def T(x):
    """Thrush, value first: T(x)(f) == f(x)"""
    return lambda f: f(x)


apply = A
compose = B
flip = C
identity = I
constant = K
pair = V
apply_to = T
Th = T
