"""
Jurídico App

Backend para gestão de processos jurídicos, funcionários, usuários e log de
atividades.
"""
