from file_mcp.cli import main

main()
