from checked_calc.main import main

main()
