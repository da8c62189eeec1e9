"""Config — settings por ambiente e logging estruturado."""
