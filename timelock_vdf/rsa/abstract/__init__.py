"""RSA trapdoor interfaces."""
