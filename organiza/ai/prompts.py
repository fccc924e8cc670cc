"""Prompt templates for the AI helpers."""

PREFERENCE_ANALYSIS_PROMPT = """Você é um assistente de IA projetado para analisar detalhes de clientes e extrair resumos perspicazes de suas preferências.
Seu resultado deve ser sempre no idioma Português do Brasil.

Analise os seguintes detalhes do cliente e forneça um resumo conciso das preferências do cliente, considerando seus projetos anteriores, resumos de visitas e quaisquer outras notas relevantes.

Nome do Cliente: {client_name}
Detalhes do Cliente:
{client_details}

Preferências Resumidas:"""

NEW_USER_EMAIL_PROMPT = """Escreva um e-mail curto e cordial, em Português do Brasil, avisando o administrador de um sistema de gestão
de que um novo usuário se cadastrou e aguarda aprovação.

Nome do usuário: {user_name}
E-mail do usuário: {user_email}

Peça que o administrador acesse "Administração" > "Gerenciamento de Usuários" para autorizar ou revogar o acesso.
Comece com a linha "Assunto:"."""

NEW_USER_EMAIL_TEMPLATE = """Assunto: Novo Cadastro no Sistema - Ação Necessária

Olá,

Um novo usuário acabou de se cadastrar no sistema de gerenciamento.

Nome do Usuário: {user_name}
E-mail: {user_email}

Por favor, acesse a seção "Administração" > "Gerenciamento de Usuários" para revisar o cadastro e autorizar ou revogar o acesso.

Atenciosamente,
Seu Sistema de Gestão
"""
