

def color_table_size(exponent):
    '''Number of bytes of a color table: 2^exponent RGB triplets.'''
    return 3 * (1 << exponent)


def scale_intensity(raw, exponent):
    '''Rescale a color table byte with respect to the number of entries.

    NOTE: the GIF specification says the bytes are already 0-255 RGB components,
          this transformation is kept to be byte-for-byte compatible with the
          tables produced so far; the result is truncated to a byte.
    '''
    return (raw * 255 // ((1 << exponent) - 1)) & 0xff


def iter_triplets(entries):
    for idx in range(0, len(entries) - 2, 3):
        yield tuple(entries[idx:idx + 3])


def format_color_table(table, n=3):
    '''Human readable representation of a color table showing the first and
    last "n" triplets.'''
    lines = [f'Global Color Map: {{size: {table.declared_size}}}']
    triplets = list(iter_triplets(table.entries))

    def _line(idx, triplet):
        return f'  {idx:03d} => [' + ', '.join(f'0x{_:02x}' for _ in triplet) + ']'

    if len(triplets) <= 2 * n:
        lines.extend(_line(idx, triplet) for idx, triplet in enumerate(triplets))
        return '\n'.join(lines)

    lines.extend(_line(idx, triplets[idx]) for idx in range(n))
    lines.extend(['    ...'] * 3)
    lines.extend(_line(idx, triplets[idx]) for idx in range(len(triplets) - n, len(triplets)))

    return '\n'.join(lines)
