class GifStructException(Exception):
    '''Base class to extend in order to throw exception in gifstruct.

    It carries a "chain" with the names of the layers that were unpacking
    when the error happened: the innermost field comes first, each enclosing
    record appends its own field name while the exception travels up.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)

    def __str__(self):
        msg = super().__str__()
        if not self.chain:
            return msg

        return '%s (at %s)' % (msg, '.'.join(reversed(self.chain)))


class UnpackException(GifStructException):
    pass


class BufferUnderrunException(UnpackException):
    '''A read asked for more bytes than the ones remaining.'''

    def __init__(self, offset, requested, available, chain=None):
        self.offset = offset
        self.requested = requested
        self.available = available
        super().__init__(
            'requested %d bytes at offset %d but only %d available' % (requested, offset, available),
            chain=chain)


class UnsupportedVersionException(UnpackException):
    pass


class MagicException(UnpackException):
    '''A fixed marker of the format doesn't have the expected value.'''
    pass


class InvalidSignatureException(MagicException):
    pass


class InvalidImageSeparatorException(MagicException):
    pass
