from knitsphere.cli import main

main()
