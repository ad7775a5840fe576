# psform

`psform` does arithmetic on polynomials written in sum-of-products form.
A polynomial is a sum of terms. Each term is an optional integer coefficient
times one-letter variables, for example `3*x*y - 2*x + 5`.

It supports five operations:

| Symbol | Operation      | Output                                        |
|--------|----------------|-----------------------------------------------|
| `+`    | addition       | the resulting polynomial                      |
| `-`    | subtraction    | the resulting polynomial                      |
| `*`    | multiplication | the resulting polynomial                      |
| `/`    | division       | the quotient, or `error` if it is impossible  |
| `=`    | comparison     | `equal` or `not equal`                        |

Like terms are combined when you add, subtract or multiply. Terms that sum
to zero are dropped. An empty result prints as `0`.

Division works only when the divisor is a single term that divides every
term of the dividend exactly, both in its coefficient and in its variables.
A zero divisor also gives `error`.

Comparison checks that the two polynomials hold the same terms, in any
order and with the factors of each term in any order. The terms are not
simplified first, so `x + x` and `2*x` compare as `not equal`.

## Installation

```
pip install .
```

## Command line

The `psform` command reads three lines from standard input:

1. the operation symbol,
2. the first polynomial,
3. the second polynomial.

It prints the result with no trailing newline and exits with status 0.

```
$ printf '+\n2*x + y\nx - y\n' | psform
3*x
```

```
$ printf '=\nx*y + 1\n1 + y*x\n' | psform
equal
```

If the operation symbol is not recognised, the command prints
`The entered operation is not supported` and exits with status 1. If a
polynomial line is missing or contains an empty term, as in `x + + y`, it
prints `Wrong PS form` and exits with status 1.

## Library use

```python
from psform.parser import parse_psform
from psform.arithmetic import psform_add, psform_multiply, format_psform

a = parse_psform("x + 1")
b = parse_psform("x - 1")
print(format_psform(psform_multiply(a, b)))
print(format_psform(psform_add(a, b)))
```

The modules are:

- `psform.multiplicand`: the `Multiplicand` factor type, the `variable` and
  `constant` constructors, and `compare_multiplicands`,
  `format_multiplicands`, `divide_multiplicands` and
  `multiply_multiplicands`.
- `psform.addend`: the `Addend` term type with its `Sign`, and
  `compare_addends`, `format_addends`, `sum_addends` and `multiply_addends`.
- `psform.arithmetic`: the `PSForm` type, `psform_add`, `psform_subtract`,
  `psform_multiply`, `psform_divide`, `psform_compare` and `format_psform`.
  `psform_divide` raises `PSFormDivisionError` when the division cannot be
  done.
- `psform.parser`: `parse_operation`, which returns an `Operation`, and
  `parse_psform`, which returns a `PSForm`. Both raise `ParseError` on input
  they cannot read.
- `psform.cli`: `run` takes the three input lines and returns the text the
  command would print. `main` is the command itself.

## What it does not do

- There is no notation for powers or parentheses. Write `x*x`, not `x^2`.
- Variables are single ASCII letters. Other characters in a polynomial line
  are ignored.
- A coefficient is recognised only when it is written at the start of its
  term, as in `2*x` and not `x*2`.
- Each run performs exactly one operation on two polynomials. There is no
  interactive mode.

## Running the tests

```
pip install .[test]
pytest
```