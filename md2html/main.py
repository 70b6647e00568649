import logging

import click

from md2html import config as md_config
from md2html import const
from md2html import markdown as md
from md2html import page as md_page
from md2html import title as md_title
from md2html import utils


class CliError(click.ClickException):
	exit_code = const.EXIT_FAILURE


def _check_style(ctx, param, value):
	if value:
		try:
			md.check_style(value)
		except ValueError as ex:
			raise click.BadParameter(str(ex)) from ex
	return value


def read_input(input_file):
	if input_file is None:
		try:
			return click.get_binary_stream("stdin").read()
		except OSError as ex:
			raise CliError(f"Error reading from stdin: {ex}") from ex
	try:
		with open(input_file, "rb") as input:
			return input.read()
	except OSError as ex:
		raise CliError(f"Error reading from {input_file}: {ex}") from ex


def write_output(output_file, data):
	if output_file is None:
		stdout = click.get_binary_stream("stdout")
		try:
			stdout.write(data)
			stdout.flush()
		except OSError as ex:
			raise CliError(f"Error writing output: {ex}") from ex
		return
	try:
		output = open(output_file, "wb")
	except OSError as ex:
		raise CliError(f"Error creating {output_file}: {ex}") from ex
	with output:
		try:
			output.write(data)
		except OSError as ex:
			raise CliError(f"Error writing output: {ex}") from ex


def convert(raw, configuration, cfg):
	"""
	Converts raw markdown bytes into the output document
	"""
	title = ""
	if configuration.standalone:
		title = md_title.get_title(raw)
		logging.debug(f"Guessed title: {title!r}")

	renderer = md.make_renderer(
		cfg,
		style=configuration.style,
		use_classes=configuration.standalone,
	)
	fragment = renderer.convert(raw)

	highlight_css = ""
	if configuration.standalone:
		highlight_css = md.highlight_css(configuration.style, cfg.highlight)
	return md_page.assemble(
		configuration,
		title,
		fragment,
		template_config=cfg.page,
		highlight_css=highlight_css,
	)


@click.command(
	help="Converts markdown INPUTFILE (stdin by default) into HTML and writes it to OUTPUTFILE (stdout by default).",
)
@click.version_option(
	const.APP_VERSION,
	"-v", "--version",
	prog_name=const.APP_NAME,
	message="%(prog)s %(version)s",
)
@click.option("-page/-no-page", "--page/--no-page", default=True, show_default=True, help="Generate a standalone HTML page")
@click.option("-css", "--css", default="", metavar="URL", help="Link to a CSS stylesheet (implies -page)")
@click.option("-style", "--style", default="", metavar="NAME", callback=_check_style, help=f"Pygments style, empty for {const.DEFAULT_HIGHLIGHT_STYLE}")
@click.option("-cpuprofile", "--cpuprofile", default="", metavar="PATH", help="Write cpu profile to a file")
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False), help="Path to md2html.json5 config")
@click.argument("input_file", metavar="INPUTFILE", required=False)
@click.argument("output_file", metavar="OUTPUTFILE", required=False)
def main(*, page, css, style, cpuprofile, config_path, input_file, output_file):
	try:
		cfg = md_config.load(config_path)
		md_config.setup_logging(cfg.logging_config)
	except (OSError, ValueError, KeyError) as ex:
		raise CliError(f"Error loading config {config_path or md_config.DEFAULT_CONFIG_PATH}: {ex!r}") from ex

	configuration = md_page.PageConfiguration.from_options(page=page, css=css, style=style)
	with utils.cpu_profile(cpuprofile):
		raw = read_input(input_file)
		try:
			data = convert(raw, configuration, cfg)
		except md.ConversionError as ex:
			raise CliError(f"Error converting {input_file or 'stdin'}: {ex}") from ex
		write_output(output_file, data)
