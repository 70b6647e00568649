import logging.config
import os

import pyjson5

from md2html import const

CONFIGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "configs")
DEFAULT_CONFIG_PATH = os.path.join(CONFIGS_DIR, "md2html.json5")


class MarkdownConfig:
	def __init__(self, params):
		self.output_format = params["output_format"]
		self.tab_length = params["tab_length"]
		self.extensions = list(params["extensions"])


class HighlightConfig:
	def __init__(self, params):
		self.default_style = params.get("default_style") or const.DEFAULT_HIGHLIGHT_STYLE
		self.css_class = params["css_class"]
		self.line_numbers = params["line_numbers"]


class PageTemplateConfig:
	def __init__(self, params):
		self.lang = params["lang"]
		self.article_class = params["article_class"]
		self.article_style = params["article_style"]


class Config:
	def __init__(self, path):
		with open(path, "rt") as config_file:
			json_config = pyjson5.load(config_file)

		self.markdown = MarkdownConfig(json_config["markdown"])
		self.highlight = HighlightConfig(json_config["highlight"])
		self.page = PageTemplateConfig(json_config["page"])

		#logging config path is relative to the config file
		self.logging_config = os.path.join(os.path.dirname(path), json_config["logging"])


def load(path=None):
	return Config(path or DEFAULT_CONFIG_PATH)


def setup_logging(config_path):
	logging.config.fileConfig(config_path, disable_existing_loggers=False)
