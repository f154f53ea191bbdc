# rcc

This is the front end of a small C compiler. It handles a deliberately tiny
subset of C: a single function that returns an integer constant.

```c
int main(void) {
    return 2;
}
```

It turns such a program into an abstract syntax tree and then into a tree
of assembly constructs (`Mov`, `AsmReturn`, `Imm`, `Register`).

## Modules

- `rcc.parsing` has `Parser` and `ParseError`.
- `rcc.ast_model` has the syntax tree: `Program`, `Function`, `Statement`,
  `Return`, `Expression` and `Constant`.
- `rcc.asm_constructs` has the assembly constructs: `AsmProgram`,
  `FunctionDefinition`, the `Instruction` subclasses `Mov` and `AsmReturn`,
  and the `Operand` subclasses `Imm` and `Register`.
- `rcc.driver` has `compute_output_file` and `run_preprocessor`.

## Parsing

The parser works on a list of token strings and follows this grammar:

```
<program>    ::= <function>
<function>   ::= "int" <identifier> "(" "void" ")" "{" <statement> "}"
<statement>  ::= "return" <exp> ";"
<exp>        ::= <int>
```

Each `parse_*` method (`parse_program`, `parse_function`,
`parse_statement`, `parse_return`, `parse_expression`, `parse_constant`)
removes the tokens it consumes from the front of the list. After a parse
you can check whether any tokens are left.

An identifier is an ASCII letter or underscore followed by letters, digits
or underscores. A constant is a decimal integer with an optional sign, and
it must fit in a 32-bit signed integer.

```python
from rcc.parsing import Parser, ParseError

tokens = ["int", "main", "(", "void", ")", "{", "return", "2", ";", "}"]
program = Parser().parse_program(tokens)

print(program.function.identifier)                                 # main
print(program.function.body.return_exp.expression.constant.value)  # 2
print(tokens)                                                       # []
```

Input that does not match the grammar raises `ParseError`, which is a
subclass of `ValueError`:

```python
try:
    Parser().parse_return(["return", ";"])
except ParseError as err:
    print(err)  # Invalid expression
```

## Lowering to assembly constructs

Every syntax-tree node has a `to_asm()` method. Calling it on a `Program`
returns an `AsmProgram` that holds one `FunctionDefinition`. That
definition's instructions move the returned constant into the return
register and then return:

```python
asm = program.to_asm()
print(asm.function_definition.identifier)   # main
for instruction in asm.function_definition.instructions:
    print(instruction)
# Mov(src=Imm(value=2), dest=Register())
# AsmReturn()
```

## Driver helpers

- `compute_output_file(input_file)` returns the path of the preprocessed
  file as a `pathlib.Path`. It is the input path with its extension
  replaced by `.i`, or with `.i` added if the input has no extension.
  For example, `"path/to/source.c"` becomes `path/to/source.i` and
  `"Makefile"` becomes `Makefile.i`.
- `run_preprocessor(gcc_path, input_file, output_file)` runs
  `gcc_path -E -P input_file -o output_file`. It captures the output and
  returns the `subprocess.CompletedProcess`.
  - If the binary cannot be started, it raises `OSError`.
  - A non-zero exit status is not raised; read it from the result's
    `returncode`.

```python
from rcc.driver import compute_output_file

print(compute_output_file("program.c"))  # program.i
```

## What it does not do

- The package has no command-line program.
- It has no tokenizer that turns C source text into tokens, so you supply
  the token list yourself.
- It does not write assembly text, and it does not assemble or link
  anything. The pipeline ends at the `AsmProgram` tree.