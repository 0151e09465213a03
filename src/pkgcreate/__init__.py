"""pkgcreate - scaffold and smoke-test workspace packages from templates."""
