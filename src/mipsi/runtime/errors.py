class InterpreterError(Exception):
    ''' Base of every reported, non-fatal interpreter error '''
    pass


class ProtectedRegisterWrite(InterpreterError):
    def __init__(self, name: str):
        super().__init__(f'{name} cannot be written to')
        self.name = name


class UnknownRegister(InterpreterError):
    def __init__(self, name: str):
        super().__init__(f'Unknown register {name!r}')
        self.name = name


class UnknownOpcode(InterpreterError):
    def __init__(self, opcode: str):
        super().__init__(f'Unknown opcode {opcode!r}')
        self.opcode = opcode


class MalformedOperands(InterpreterError):
    def __init__(self, opcode: str, operands: str, expected: str):
        super().__init__(f'Malformed operands {operands!r} for {opcode}, expected {expected}')
        self.opcode = opcode
        self.operands = operands


class MalformedStatement(InterpreterError):
    def __init__(self, lineno: int, line: str):
        super().__init__(f'Line {lineno}: cannot parse {line!r}')
        self.lineno = lineno


class KernelError(InterpreterError):
    pass
