"""Host adapters embedding the engine in concrete UIs."""
