from rules_mcp.cli import main

main()
