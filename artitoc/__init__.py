"""
artitoc: table of contents and author index for LaTeX article collections.

Reads the .atoc file written while typesetting and produces two LaTeX
fragments to \\input on the next run:

    artitoc --toc toc.tex --authors authors.tex main.atoc
"""
