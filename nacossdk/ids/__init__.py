"""UUID values, generation and database conversion."""