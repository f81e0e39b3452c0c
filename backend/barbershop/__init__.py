"""
Republic Barbershop: API сайта и админ-панели
"""
