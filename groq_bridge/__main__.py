from groq_bridge.adapters.discord.launcher import main

main()
