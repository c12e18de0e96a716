from primevue_mcp.cli import main

main()
