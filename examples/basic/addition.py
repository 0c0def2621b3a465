"""Parse "1 + 2 = 3" from bytes into a typed value."""

from dataclasses import dataclass

from escaner import Number, Scanner, Token, parse, recognize


@dataclass(frozen=True)
class Addition:
    lhs: int
    rhs: int
    result: int

    @classmethod
    def accept(cls, scanner: Scanner[int]) -> "Addition":
        lhs = Number.accept(scanner).value
        recognize(Token.WHITESPACE, scanner)
        recognize(Token.PLUS, scanner)
        recognize(Token.WHITESPACE, scanner)
        rhs = Number.accept(scanner).value
        recognize(Token.WHITESPACE, scanner)
        recognize(Token.EQUAL, scanner)
        recognize(Token.WHITESPACE, scanner)
        result = Number.accept(scanner).value
        return cls(lhs=lhs, rhs=rhs, result=result)


addition = parse(Addition, b"1 + 2 = 3", complete=True)
print(addition)
print("correct:", addition.lhs + addition.rhs == addition.result)
