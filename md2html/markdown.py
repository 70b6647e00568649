import logging
import xml.etree.ElementTree as xml

import markdown
import pygments.formatters
import pygments.styles
import pygments.util


class ConversionError(Exception):
	"""
	Raised when the markdown source can not be converted to HTML
	"""


class Renderer:
	"""
	Wraps markdown.Markdown object,
	resetting it before each conversion
	"""
	def __init__(self, md_renderer):
		self._renderer = md_renderer

	def convert(self, raw):
		"""
		Converts raw markdown bytes to an HTML fragment
		"""
		#invalid UTF-8 sequences are replaced, same as in title extraction
		markup = raw.decode("utf-8-sig", errors="replace")
		self._renderer.reset()
		try:
			return self._renderer.convert(markup)
		except Exception as ex:
			logging.debug("Markdown conversion failed", exc_info=True)
			raise ConversionError(str(ex)) from ex


def resolve_style(style, highlight_config):
	"""
	Maps empty style name to the default one
	"""
	return style or highlight_config.default_style


def check_style(style):
	"""
	Raises ValueError if pygments does not know the style
	"""
	try:
		pygments.styles.get_style_by_name(style)
	except pygments.util.ClassNotFound as ex:
		raise ValueError(f"Unknown highlight style: {style}") from ex


def highlight_css(style, highlight_config):
	"""
	Returns pygments style definitions for highlighted code blocks
	"""
	formatter = pygments.formatters.HtmlFormatter(
		style=resolve_style(style, highlight_config),
	)
	return formatter.get_style_defs("." + highlight_config.css_class)


def make_renderer(config, style="", use_classes=True):
	"""
	Creates renderer for GitHub flavoured markdown.

	If use_classes is set, highlighted code is marked with CSS classes
	(see highlight_css()), otherwise pygments emits inline styles.
	"""
	renderer = markdown.Markdown(
		extensions=config.markdown.extensions,
		extension_configs={
			"markdown.extensions.codehilite": {
				"css_class": config.highlight.css_class,
				"guess_lang": False,
				"linenums": config.highlight.line_numbers,
				"noclasses": not use_classes,
				"pygments_style": resolve_style(style, config.highlight),
				"use_pygments": True,
			},
		},
		output_format=config.markdown.output_format,
		tab_length=config.markdown.tab_length,
	)
	renderer.inlinePatterns.register(MarkdownStrikethrough(), name="strikethrough", priority=-1)
	return Renderer(renderer)


class MarkdownStrikethrough(markdown.inlinepatterns.Pattern):
	"""
	Marks the text enclosed into doubled tildas as deleted,
	thus emulating the syntax of github flavoured markdown:
	https://github.github.com/gfm/#strikethrough-extension-
	"""
	def __init__(self):
		super().__init__(r"\~\~(?P<strikethrough>[^\~]+)\~\~")

	def handleMatch(self, m):
		element = xml.Element("del")
		element.text = m.group("strikethrough")
		return element

