from md2html import const


def _skip(data, pos, chars):
	while pos < len(data) and data[pos] in chars:
		pos += 1
	return pos


def _skip_terminator(data, pos):
	"""
	Moves pos past the line terminator it points to,
	treating \\r\\n as a single terminator
	"""
	if pos >= len(data):
		return pos
	if data[pos] == const.CR and pos + 1 < len(data) and data[pos + 1] == const.LF:
		pos += 1
	return pos + 1


def _decode(line):
	return line.decode("utf-8", errors="replace").strip()


def get_title(raw):
	"""
	Guesses the title of a markdown document from its first line.
	Recognizes `# Title` headers and `Title` lines underlined with `=`.
	Falls back to const.DEFAULT_TITLE and never raises.
	"""
	pos = _skip(raw, 0, const.LINE_TERMINATORS)
	if pos >= len(raw):
		return const.DEFAULT_TITLE

	start = pos
	while pos < len(raw) and raw[pos] not in const.LINE_TERMINATORS:
		pos += 1
	line1 = raw[start:pos]
	pos = _skip_terminator(raw, pos)

	#prefix header
	if (
		len(line1) >= 3 and
		line1[0] == const.HASH and
		line1[1] in const.BLANKS
	):
		return _decode(line1[2:])

	#underlined header
	if pos >= len(raw) or raw[pos] != const.EQUALS:
		return const.DEFAULT_TITLE
	pos = _skip(raw, pos, const.UNDERLINE)
	pos = _skip(raw, pos, const.BLANKS)
	if pos < len(raw) and raw[pos] not in const.LINE_TERMINATORS:
		return const.DEFAULT_TITLE
	return _decode(line1)
