"""Utils — helpers e exceções compartilhadas."""
