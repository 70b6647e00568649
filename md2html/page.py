import dataclasses
import os

import jinja2
import markupsafe

from md2html import const

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


@dataclasses.dataclass(frozen=True)
class PageConfiguration:
	"""
	Output options, built once from the command line
	"""
	standalone: bool = True
	#external stylesheet url, empty string means built-in stylesheet
	css: str = ""
	#pygments style name, empty string means default style
	style: str = ""

	@classmethod
	def from_options(cls, *, page, css, style):
		#linking a stylesheet makes sense for standalone pages only
		return cls(
			standalone=(page or bool(css)),
			css=css or "",
			style=style or "",
		)


def make_environment():
	env = jinja2.Environment(
		loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
		autoescape=True,
		undefined=jinja2.StrictUndefined,
	)
	env.trim_blocks = True
	env.lstrip_blocks = True
	env.keep_trailing_newline = True
	return env


def assemble(configuration, title, fragment, *, template_config, highlight_css=""):
	"""
	Builds output document from rendered HTML fragment.

	In fragment mode the fragment is returned as is.
	Otherwise it is placed into <article> container of the standalone page,
	title is escaped, stylesheet is either inlined or linked.
	"""
	if not configuration.standalone:
		return fragment.encode("utf-8")
	env = make_environment()
	template = env.get_template(const.TEMPLATE_PAGE)
	page = template.render(
		title=title,
		css=configuration.css,
		highlight_css=markupsafe.Markup(highlight_css),
		fragment=markupsafe.Markup(fragment),
		page=template_config,
	)
	return page.encode("utf-8")
