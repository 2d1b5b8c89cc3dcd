"""Scripts used for emoji repository automation by GitHub Actions

This contains utility scripts used within GitHub Actions. Keeping them in a
package means the release workflow only has to install emojitools to get
the current versions, rather than carrying copies of the scripts."""
