from logjob.app import main

main()
