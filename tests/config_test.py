#!/usr/bin/env python3
import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from md2html import config

CONFIG_TEMPLATE = """
{
	// comments and trailing commas are allowed
	"markdown": {
		"output_format": "html",
		"tab_length": 2,
		"extensions": ["markdown.extensions.fenced_code", "markdown.extensions.codehilite"],
	},
	"highlight": {
		"default_style": "%s",
		"css_class": "code",
		"line_numbers": true,
	},
	"page": {
		"lang": "de",
		"article_class": "content",
		"article_style": "",
	},
	"logging": "logging/custom.conf",
}
"""


def test_default_config():
	cfg = config.load()
	assert cfg.markdown.output_format == "xhtml"
	assert cfg.markdown.tab_length == 4
	assert "markdown.extensions.codehilite" in cfg.markdown.extensions
	assert cfg.highlight.default_style == "monokai"
	assert cfg.highlight.css_class == "highlight"
	assert not cfg.highlight.line_numbers
	assert cfg.page.lang == "en"
	assert os.path.isfile(cfg.logging_config)


def test_custom_config(tmp_path):
	path = tmp_path / "custom.json5"
	path.write_text(CONFIG_TEMPLATE % "friendly")
	cfg = config.load(str(path))
	assert cfg.markdown.output_format == "html"
	assert cfg.markdown.extensions == [
		"markdown.extensions.fenced_code",
		"markdown.extensions.codehilite",
	]
	assert cfg.highlight.default_style == "friendly"
	assert cfg.highlight.line_numbers
	assert cfg.page.lang == "de"
	assert cfg.logging_config == os.path.join(str(tmp_path), "logging/custom.conf")


def test_empty_default_style(tmp_path):
	path = tmp_path / "custom.json5"
	path.write_text(CONFIG_TEMPLATE % "")
	assert config.load(str(path)).highlight.default_style == "monokai"


def test_broken_config(tmp_path):
	path = tmp_path / "broken.json5"
	path.write_text('{"markdown": {}}')
	with pytest.raises(KeyError):
		config.load(str(path))

	path.write_text('{"markdown": ')
	with pytest.raises(ValueError):
		config.load(str(path))
