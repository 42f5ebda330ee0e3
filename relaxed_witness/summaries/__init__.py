"""Text, Markdown and plot summaries of built witness complexes."""
