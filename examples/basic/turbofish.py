"""Match the 4-character ``::<>`` operator over a sequence of characters."""

from escaner import TURBOFISH, Scanner, recognize

scanner = Scanner(tuple("::<>b"))
print(TURBOFISH.matcher(scanner.remaining()))  # (True, 4)

operator = recognize(TURBOFISH, scanner)
print(operator, scanner.current_position(), scanner.remaining().materialize())
