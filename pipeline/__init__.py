"""
Manuscript text preparation stages.

1. translation_text - split page text into citation-labeled segments and
   pack them into token-bounded translation batches
2. footnote_references - repair OCR-damaged footnote reference markers
"""
