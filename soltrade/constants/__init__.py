"""Program addresses, seeds, fee rates, landing-service tables and trade defaults."""