PAGES_KEY = "pages"
LINES_KEY = "lines"

TRANSLATION_STAGE = "translation-text"
FOOTNOTES_STAGE = "footnote-references"
